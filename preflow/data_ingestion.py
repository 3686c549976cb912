import pandas as pd
import numpy as np
from typing import List, Tuple, Optional
import logging

# Configure logging for the module
logger = logging.getLogger(__name__)


class DataIngestion:
    def __init__(self, df_edges: pd.DataFrame, from_col: str = 'from', to_col: str = 'to',
                 capacity_col: str = 'capacity'):
        """
        Turn a labelled edge list into ids, edges and capacities.

        Args:
            df_edges: One row per directed edge
            from_col: Column holding the tail label
            to_col: Column holding the head label
            capacity_col: Column holding the capacity
        """
        self.logger = logging.getLogger(__name__)

        missing = [col for col in (from_col, to_col, capacity_col) if col not in df_edges.columns]
        if missing:
            raise ValueError(f"Edge data is missing columns: {', '.join(missing)}")

        df = pd.DataFrame({
            'from': df_edges[from_col],
            'to': df_edges[to_col],
            'capacity': pd.to_numeric(df_edges[capacity_col], errors='coerce'),
        })
        df = self._clean(df)

        # Create initial mappings
        unique_labels = pd.concat([df['from'], df['to']]).drop_duplicates().reset_index(drop=True)
        self.label_to_id = {label: str(idx) for idx, label in enumerate(unique_labels)}
        self.id_to_label = {str(idx): label for idx, label in enumerate(unique_labels)}

        # Initialize containers for edges
        self.edges: List[Tuple[str, str]] = []
        self.capacities: List[float] = []
        self._process_edges(df)

    def _clean(self, df: pd.DataFrame) -> pd.DataFrame:
        """Drop incomplete rows and self-loops, reject negative capacities."""
        incomplete = df[['from', 'to', 'capacity']].isna().any(axis=1)
        if incomplete.any():
            self.logger.warning(f"Dropping {int(incomplete.sum())} edges with missing endpoints or capacity")
            df = df[~incomplete]

        df = df.assign(
            **{'from': df['from'].astype(str).str.strip(), 'to': df['to'].astype(str).str.strip()}
        )

        negative = df[df['capacity'] < 0]
        if not negative.empty:
            first = negative.iloc[0]
            raise ValueError(
                f"Negative capacity {first['capacity']} on edge {first['from']} -> {first['to']}"
            )

        loops = df['from'] == df['to']
        if loops.any():
            self.logger.debug(f"Dropping {int(loops.sum())} self-loops, they carry no flow")
            df = df[~loops]

        return df

    def _process_edges(self, df: pd.DataFrame):
        """Merge parallel edges by summing capacities and store the result."""
        if df.empty:
            return

        merged = df.groupby(['from', 'to'], sort=False, as_index=False)['capacity'].sum()

        capacities = merged['capacity'].to_numpy()
        if np.all(np.mod(capacities, 1) == 0):
            capacities = capacities.astype(np.int64)

        self.edges = list(zip(merged['from'].map(self.label_to_id), merged['to'].map(self.label_to_id)))
        self.capacities = capacities.tolist()

    def get_id_for_label(self, label) -> Optional[str]:
        return self.label_to_id.get(str(label).strip())

    def get_label_for_id(self, id: str) -> Optional[str]:
        return self.id_to_label.get(id)
