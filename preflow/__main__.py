from .main import main

exit(main())
