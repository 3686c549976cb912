import os
import tempfile
import unittest
from unittest.mock import Mock, patch
import pandas as pd
import numpy as np
import pytest
from typing import Dict, List, Tuple

from preflow.config import load_settings
from preflow.data_ingestion import DataIngestion
from preflow.graph import NetworkXGraph, ORToolsGraph, PushRelabelGraph, NetworkFlowAnalysis, GraphCreator
from preflow.graph.flow import (
    calculate_flow_metrics,
    decompose_flow,
    find_flow_path,
    verify_capacity_constraints,
    verify_flow_conservation,
)
from preflow.graph_manager import GraphManager
from preflow.main import main

IMPLEMENTATIONS = ['push_relabel', 'networkx', 'ortools']


class FlowTestData:
    """
    Test data generator for labelled capacity networks.

    Networks mimic the edge lists the package ingests:
    1. Vertices identified by string labels
    2. Integral capacities drawn at random
    3. Parallel edges and self-loops mixed in, as real exports contain them
    """

    def create_test_network(self, num_vertices: int = 8, num_edges: int = 30, seed: int = 7) -> pd.DataFrame:
        """
        Create a random edge list.

        Returns:
            DataFrame with from, to and capacity columns
        """
        rng = np.random.default_rng(seed)
        labels = [f"v{i}" for i in range(num_vertices)]
        rows = []
        for _ in range(num_edges):
            u, v = rng.integers(0, num_vertices, size=2)
            rows.append({
                'from': labels[u],
                'to': labels[v],
                'capacity': int(rng.integers(1, 50))
            })
        # Guarantee a duplicate pair and a self-loop
        rows.append({'from': 'v0', 'to': 'v1', 'capacity': 5})
        rows.append({'from': 'v0', 'to': 'v1', 'capacity': 6})
        rows.append({'from': 'v2', 'to': 'v2', 'capacity': 9})
        return pd.DataFrame(rows)

    def get_expected_graph_structure(self, df_edges: pd.DataFrame) -> Dict:
        """
        Calculate expected graph structure from test data.

        Self-loops disappear and parallel edges collapse into one edge whose
        capacity is the sum.
        """
        df = df_edges[df_edges['from'] != df_edges['to']]
        merged = df.groupby(['from', 'to'], as_index=False)['capacity'].sum()
        vertices = set(merged['from']) | set(merged['to'])
        edges = [
            {'from': row['from'], 'to': row['to'], 'capacity': row['capacity']}
            for _, row in merged.iterrows()
        ]
        return {
            'vertices': sorted(vertices),
            'edges': edges
        }


def create_graph(impl_type: str, data_ingestion: DataIngestion):
    return GraphCreator.create_graph(impl_type, data_ingestion.edges, data_ingestion.capacities)


class TestGraphConstruction(unittest.TestCase):
    """
    Test suite for verifying correct graph construction across all implementations.

    Tests that each graph implementation:
    1. Creates a vertex for every label that has an edge
    2. Creates merged edges with summed capacities
    3. Drops self-loops
    """

    def setUp(self):
        """Initialize test environment with a random edge list."""
        self.test_data = FlowTestData()
        self.df_edges = self.test_data.create_test_network()
        self.data_ingestion = DataIngestion(self.df_edges)

        self.graphs = {
            impl: create_graph(impl, self.data_ingestion)
            for impl in IMPLEMENTATIONS
        }
        self.expected_structure = self.test_data.get_expected_graph_structure(self.df_edges)

    def test_graph_types(self):
        self.assertIsInstance(self.graphs['push_relabel'], PushRelabelGraph)
        self.assertIsInstance(self.graphs['networkx'], NetworkXGraph)
        self.assertIsInstance(self.graphs['ortools'], ORToolsGraph)
        with self.assertRaises(ValueError):
            GraphCreator.create_graph('graph_tool', [], [])

    def test_vertex_creation(self):
        """
        Test that all implementations create correct vertices.
        """
        expected_vertices = {
            self.data_ingestion.get_id_for_label(label)
            for label in self.expected_structure['vertices']
        }

        for impl_name, graph in self.graphs.items():
            actual_vertices = set(graph.get_vertices())

            missing_vertices = expected_vertices - actual_vertices
            self.assertEqual(
                len(missing_vertices),
                0,
                f"{impl_name}: Missing vertices: {missing_vertices}"
            )

            extra_vertices = actual_vertices - expected_vertices
            self.assertEqual(
                len(extra_vertices),
                0,
                f"{impl_name}: Unexpected vertices: {extra_vertices}"
            )

    def test_edge_creation(self):
        """
        Test that all implementations create correct edges with proper capacities.
        """
        label_to_id = self.data_ingestion.get_id_for_label
        for impl_name, graph in self.graphs.items():
            self.assertEqual(graph.num_edges(), len(self.expected_structure['edges']))
            for edge in self.expected_structure['edges']:
                u, v = label_to_id(edge['from']), label_to_id(edge['to'])
                self.assertTrue(
                    graph.has_edge(u, v),
                    f"{impl_name}: Missing edge {edge['from']} -> {edge['to']}"
                )
                self.assertEqual(
                    graph.get_edge_capacity(u, v),
                    edge['capacity'],
                    f"{impl_name}: Wrong capacity for {edge['from']} -> {edge['to']}"
                )

    def test_degrees(self):
        v0 = self.data_ingestion.get_id_for_label('v0')
        for impl_name, graph in self.graphs.items():
            self.assertEqual(graph.out_degree(v0), len(list(graph.successors(v0))), impl_name)
            self.assertEqual(graph.in_degree(v0), len(list(graph.predecessors(v0))), impl_name)
            self.assertEqual(graph.degree(v0), graph.in_degree(v0) + graph.out_degree(v0), impl_name)

    def test_self_loop_removed(self):
        v2 = self.data_ingestion.get_id_for_label('v2')
        for impl_name, graph in self.graphs.items():
            self.assertFalse(graph.has_edge(v2, v2), f"{impl_name}: self-loop kept")


class TestBackendConsistency(unittest.TestCase):
    """
    All backends must agree on flow values and cut capacities.
    """

    def setUp(self):
        self.test_data = FlowTestData()

    def test_flow_values_agree(self):
        for seed in range(5):
            data_ingestion = DataIngestion(self.test_data.create_test_network(seed=seed))
            graphs = {impl: create_graph(impl, data_ingestion) for impl in IMPLEMENTATIONS}
            ids = sorted(graphs['push_relabel'].get_vertices(), key=int)

            for source in ids:
                for sink in ids:
                    if source == sink:
                        continue
                    flows = {impl: graph.compute_flow(source, sink)[0] for impl, graph in graphs.items()}
                    self.assertEqual(
                        len(set(flows.values())),
                        1,
                        f"Inconsistent flow values for seed {seed}, {source}->{sink}: {flows}"
                    )

    def test_cut_matches_flow(self):
        data_ingestion = DataIngestion(self.test_data.create_test_network(num_vertices=10, num_edges=40))
        source = data_ingestion.get_id_for_label('v0')
        sink = data_ingestion.get_id_for_label('v1')
        for impl in IMPLEMENTATIONS:
            graph = create_graph(impl, data_ingestion)
            flow_value, flow_dict = graph.compute_flow(source, sink)
            cut_value, cut_edges = graph.minimum_cut(source, sink)

            self.assertEqual(cut_value, flow_value, f"{impl}: cut differs from flow")
            self.assertEqual(sum(c for _, _, c in cut_edges), cut_value, f"{impl}: cut edges do not add up")
            for u, v, capacity in cut_edges:
                self.assertEqual(flow_dict.get(u, {}).get(v, 0), capacity, f"{impl}: cut edge {u}->{v} not saturated")

    def test_flow_dicts_are_valid(self):
        data_ingestion = DataIngestion(self.test_data.create_test_network(seed=3))
        source = data_ingestion.get_id_for_label('v0')
        sink = data_ingestion.get_id_for_label('v1')
        for impl in IMPLEMENTATIONS:
            graph = create_graph(impl, data_ingestion)
            _, flow_dict = graph.compute_flow(source, sink)
            self.assertTrue(verify_flow_conservation(flow_dict, source, sink), f"{impl}: conservation broken")
            self.assertTrue(verify_capacity_constraints(flow_dict, graph.get_edges()), f"{impl}: capacity broken")

    def test_unknown_terminal(self):
        data_ingestion = DataIngestion(self.test_data.create_test_network())
        for impl in IMPLEMENTATIONS:
            graph = create_graph(impl, data_ingestion)
            with self.assertRaises(ValueError):
                graph.compute_flow('0', 'missing')

    def test_ortools_rejects_fractional_capacity(self):
        with pytest.raises(ValueError):
            ORToolsGraph([('a', 'b')], [1.5])


class TestEndToEndFlow(unittest.TestCase):
    """
    End-to-end testing of the complete flow analysis system.

    Tests:
    1. CSV loading through GraphManager
    2. Graph construction from processed data
    3. Flow computation, decomposition and cut
    4. Translation of results back to labels
    """

    def setUp(self):
        """Set up test environment with pandas.read_csv mocked."""
        self.df_edges = pd.DataFrame({
            'from': ['s', 's', 'a', 'b', 'a'],
            'to': ['a', 'b', 't', 't', 'b'],
            'capacity': [3, 2, 2, 3, 1]
        })

        mock_csv = Mock(return_value=self.df_edges.copy())
        self.csv_patcher = patch('pandas.read_csv', mock_csv)
        self.csv_patcher.start()

        self.managers = {
            impl: GraphManager(data_source="edges.csv", graph_type=impl)
            for impl in IMPLEMENTATIONS
        }

    def tearDown(self):
        """Clean up mocks after tests."""
        self.csv_patcher.stop()

    def test_flow_analysis(self):
        """
        Test complete flow analysis through each implementation.
        """
        for impl_name, manager in self.managers.items():
            flow_value, paths, edge_flows, (cut_value, cut_edges) = manager.analyze_flow('s', 't')

            self.assertEqual(flow_value, 5, f"{impl_name}: Wrong flow value")
            self.assertEqual(cut_value, 5, f"{impl_name}: Wrong cut value")
            self.assertEqual(
                sum(amount for _, amount in paths),
                flow_value,
                f"{impl_name}: Paths do not carry the whole flow"
            )
            self._verify_paths(paths, impl_name)

            inflow = sum(flow for (u, v), flow in edge_flows.items() if v == 't')
            self.assertEqual(inflow, flow_value, f"{impl_name}: Edge flows do not reach the sink")
            # Backends may return different minimum cuts of equal capacity
            self.assertEqual(sum(c for _, _, c in cut_edges), cut_value, f"{impl_name}: Wrong cut edges")
            capacities = {(u, v): c for u, v, c in self.df_edges.itertuples(index=False)}
            for u, v, capacity in cut_edges:
                self.assertEqual(capacities[(u, v)], capacity, f"{impl_name}: Wrong capacity on {u}->{v}")

    def test_push_relabel_cut_is_source_side(self):
        _, _, _, (_, cut_edges) = self.managers['push_relabel'].analyze_flow('s', 't')
        self.assertEqual(sorted((u, v) for u, v, _ in cut_edges), [('s', 'a'), ('s', 'b')])

    def _verify_paths(self, paths: List[Tuple[List[str], float]], impl_name: str):
        """
        Verify every path starts at the source, ends at the sink and follows existing edges.
        """
        existing = set(zip(self.df_edges['from'], self.df_edges['to']))
        for path, amount in paths:
            self.assertEqual(path[0], 's', f"{impl_name}: Path doesn't start at source")
            self.assertEqual(path[-1], 't', f"{impl_name}: Path doesn't end at sink")
            self.assertGreater(amount, 0)
            for u, v in zip(path[:-1], path[1:]):
                self.assertIn((u, v), existing, f"{impl_name}: Path uses missing edge {u}->{v}")

    def test_requested_flow_limits_paths(self):
        manager = self.managers['push_relabel']
        flow_value, paths, _, _ = manager.analyze_flow('s', 't', requested_flow=3)
        self.assertEqual(flow_value, 5)
        self.assertEqual(sum(amount for _, amount in paths), 3)

    def test_compare_backends(self):
        results = self.managers['push_relabel'].compare_backends('s', 't')
        self.assertEqual(results, {'push_relabel': 5, 'networkx': 5, 'ortools': 5})

    def test_compare_backends_skips_integral_only_backend(self):
        """
        OR-Tools only takes integral capacities, so it drops out of the comparison.
        """
        manager = GraphManager(pd.DataFrame({
            'from': ['s', 'a', 's'],
            'to': ['a', 't', 't'],
            'capacity': [1.5, 2.5, 0.25]
        }))
        results = manager.compare_backends('s', 't')
        self.assertEqual(results, {'push_relabel': 1.75, 'networkx': 1.75})

    def test_unknown_label(self):
        with self.assertRaises(ValueError):
            self.managers['push_relabel'].analyze_flow('s', 'nowhere')

    def test_node_info(self):
        info = self.managers['networkx'].get_node_info()
        self.assertIn("Total nodes: 4", info)
        self.assertIn("Total edges: 5", info)

    def test_invalid_data_source(self):
        with self.assertRaises(ValueError):
            GraphManager(data_source=("edges.csv", "other.csv"))


class TestPathFinding(unittest.TestCase):
    """
    Test suite specifically for path finding.
    Tests different network configurations and edge cases.
    """

    def setUp(self):
        """Create test networks with specific path configurations."""
        self.scenarios = {
            'simple_path': self._create_simple_path_network(),
            'multiple_paths': self._create_multiple_paths_network(),
            'cyclic_paths': self._create_cyclic_network(),
            'no_path': self._create_disconnected_network()
        }

    def _create_simple_path_network(self) -> pd.DataFrame:
        """Single chain whose narrowest edge decides the flow."""
        return pd.DataFrame({
            'from': ['user1', 'user2'],
            'to': ['user2', 'user3'],
            'capacity': [1000, 500]
        })

    def _create_multiple_paths_network(self) -> pd.DataFrame:
        """Two disjoint routes from user1 to user3."""
        return pd.DataFrame({
            'from': ['user1', 'user2', 'user1', 'user4'],
            'to': ['user2', 'user3', 'user4', 'user3'],
            'capacity': [500, 500, 300, 300]
        })

    def _create_cyclic_network(self) -> pd.DataFrame:
        """Create network with cycles to test cycle handling."""
        return pd.DataFrame({
            'from': ['user1', 'user2', 'user3', 'user2'],
            'to': ['user2', 'user3', 'user1', 'user1'],
            'capacity': [1000, 1000, 1000, 200]
        })

    def _create_disconnected_network(self) -> pd.DataFrame:
        """Create network with no valid paths between some nodes."""
        return pd.DataFrame({
            'from': ['user1', 'user3'],
            'to': ['user2', 'user4'],
            'capacity': [1000, 1000]
        })

    def _initialize_implementation(self, df_edges: pd.DataFrame, impl_type: str) -> Tuple[NetworkFlowAnalysis, DataIngestion]:
        data_ingestion = DataIngestion(df_edges)
        graph = create_graph(impl_type, data_ingestion)
        return NetworkFlowAnalysis(graph), data_ingestion

    def test_simple_path(self):
        """Test flow finding through simple linear path."""
        for impl_type in IMPLEMENTATIONS:
            analyzer, ids = self._initialize_implementation(self.scenarios['simple_path'], impl_type)

            flow_value, paths, _, _ = analyzer.analyze_flow(
                ids.get_id_for_label('user1'), ids.get_id_for_label('user3')
            )

            self.assertEqual(len(paths), 1, f"{impl_type}: Wrong number of paths in simple network")
            self.assertEqual(flow_value, 500, f"{impl_type}: Incorrect flow value in simple path")

    def test_multiple_paths(self):
        """Test finding and utilizing multiple valid paths."""
        for impl_type in IMPLEMENTATIONS:
            analyzer, ids = self._initialize_implementation(self.scenarios['multiple_paths'], impl_type)

            flow_value, paths, _, _ = analyzer.analyze_flow(
                ids.get_id_for_label('user1'), ids.get_id_for_label('user3')
            )

            self.assertGreater(len(paths), 1, f"{impl_type}: Failed to find multiple paths")
            self.assertEqual(flow_value, 800, f"{impl_type}: Wrong flow value")
            self.assertEqual(
                flow_value,
                sum(amount for _, amount in paths),
                f"{impl_type}: Flow sum mismatch in multiple paths"
            )

    def test_cyclic_paths(self):
        """Test correct handling of cycles in the network."""
        for impl_type in IMPLEMENTATIONS:
            analyzer, ids = self._initialize_implementation(self.scenarios['cyclic_paths'], impl_type)

            flow_value, paths, _, _ = analyzer.analyze_flow(
                ids.get_id_for_label('user1'), ids.get_id_for_label('user3')
            )
            self.assertEqual(flow_value, 1000, f"{impl_type}: Wrong flow value in cyclic network")

            for path, _ in paths:
                self.assertEqual(len(path), len(set(path)), f"{impl_type}: Cycle detected in path")

    def test_no_path(self):
        """Test correct handling when no valid path exists."""
        for impl_type in IMPLEMENTATIONS:
            analyzer, ids = self._initialize_implementation(self.scenarios['no_path'], impl_type)

            flow_value, paths, edge_flows, (cut_value, cut_edges) = analyzer.analyze_flow(
                ids.get_id_for_label('user1'), ids.get_id_for_label('user4')
            )

            self.assertEqual(flow_value, 0, f"{impl_type}: Non-zero flow in disconnected network")
            self.assertEqual(len(paths), 0, f"{impl_type}: Found paths in disconnected network")
            self.assertEqual(len(edge_flows), 0, f"{impl_type}: Found flows in disconnected network")
            self.assertEqual(cut_value, 0, f"{impl_type}: Non-zero cut in disconnected network")


class TestDataIngestion(unittest.TestCase):

    def test_label_mapping(self):
        data = DataIngestion(pd.DataFrame({
            'from': [' a', 'b'],
            'to': ['b', 'c '],
            'capacity': [1, 2]
        }))
        self.assertEqual(data.label_to_id, {'a': '0', 'b': '1', 'c': '2'})
        self.assertEqual(data.get_label_for_id('2'), 'c')
        self.assertEqual(data.get_id_for_label(' b '), '1')
        self.assertIsNone(data.get_id_for_label('z'))
        self.assertEqual(data.edges, [('0', '1'), ('1', '2')])

    def test_parallel_edges_summed(self):
        data = DataIngestion(pd.DataFrame({
            'from': ['a', 'a', 'a'],
            'to': ['b', 'b', 'c'],
            'capacity': [2, 3, 4]
        }))
        self.assertEqual(dict(zip(data.edges, data.capacities)), {('0', '1'): 5, ('0', '2'): 4})
        self.assertTrue(all(isinstance(c, int) for c in data.capacities))

    def test_fractional_capacities_kept(self):
        data = DataIngestion(pd.DataFrame({'from': ['a'], 'to': ['b'], 'capacity': [2.5]}))
        self.assertEqual(data.capacities, [2.5])

    def test_negative_capacity(self):
        with self.assertRaises(ValueError):
            DataIngestion(pd.DataFrame({'from': ['a'], 'to': ['b'], 'capacity': [-1]}))

    def test_missing_columns(self):
        with self.assertRaises(ValueError):
            DataIngestion(pd.DataFrame({'source': ['a'], 'to': ['b'], 'capacity': [1]}))

    def test_custom_columns(self):
        data = DataIngestion(
            pd.DataFrame({'u': ['a'], 'v': ['b'], 'cap_mld': [7]}),
            from_col='u', to_col='v', capacity_col='cap_mld'
        )
        self.assertEqual(data.capacities, [7])

    def test_incomplete_rows_dropped(self):
        data = DataIngestion(pd.DataFrame({
            'from': ['a', None, 'b'],
            'to': ['b', 'c', 'c'],
            'capacity': [1, 2, 'n/a']
        }))
        self.assertEqual(data.edges, [('0', '1')])
        self.assertNotIn('c', data.label_to_id)


class TestFlowUtils(unittest.TestCase):

    def setUp(self):
        self.flow_dict = {
            's': {'a': 3, 'b': 2},
            'a': {'t': 2, 'b': 1},
            'b': {'t': 3},
        }

    def test_conservation(self):
        self.assertTrue(verify_flow_conservation(self.flow_dict, 's', 't'))
        broken = {'s': {'a': 3}, 'a': {'t': 2}}
        self.assertFalse(verify_flow_conservation(broken, 's', 't'))
        # Node with inflow only
        self.assertFalse(verify_flow_conservation({'s': {'a': 1}}, 's', 't'))

    def test_capacity_constraints(self):
        edges = [('s', 'a', {'capacity': 3}), ('a', 't', {'capacity': 1})]
        self.assertTrue(verify_capacity_constraints({'s': {'a': 1}, 'a': {'t': 1}}, edges))
        self.assertFalse(verify_capacity_constraints({'s': {'a': 1}, 'a': {'t': 2}}, edges))
        self.assertFalse(verify_capacity_constraints({'s': {'t': 1}}, edges))

    def test_find_flow_path(self):
        path = find_flow_path(self.flow_dict, 's', 't')
        self.assertEqual(path[0], 's')
        self.assertEqual(path[-1], 't')
        self.assertEqual(find_flow_path(self.flow_dict, 't', 's'), [])

    def test_decompose_flow(self):
        paths, edge_flows = decompose_flow(self.flow_dict, 's', 't')
        self.assertEqual(sum(amount for _, amount in paths), 5)
        self.assertEqual(edge_flows, {('s', 'a'): 3, ('s', 'b'): 2, ('a', 't'): 2, ('a', 'b'): 1, ('b', 't'): 3})
        # Input is left untouched
        self.assertEqual(self.flow_dict['s'], {'a': 3, 'b': 2})

    def test_decompose_flow_requested(self):
        paths, _ = decompose_flow(self.flow_dict, 's', 't', requested_flow=1)
        self.assertEqual(sum(amount for _, amount in paths), 1)
        self.assertEqual(decompose_flow(self.flow_dict, 's', 's'), ([], {}))

    def test_metrics(self):
        paths, edge_flows = decompose_flow(self.flow_dict, 's', 't')
        metrics = calculate_flow_metrics(paths, edge_flows)
        self.assertEqual(metrics['total_flow'], 5)
        self.assertEqual(metrics['num_paths'], len(paths))
        self.assertEqual(metrics['unique_edges'], 5)
        self.assertGreaterEqual(metrics['min_path_length'], 3)
        self.assertEqual(calculate_flow_metrics([], {})['total_flow'], 0)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = os.path.join(tmp, '.env')
            open(env_file, 'w').close()
            with patch.dict(os.environ, {}, clear=True):
                settings = load_settings(env_file)
        self.assertEqual(settings, {'graph_type': 'push_relabel', 'log_level': 'INFO', 'output_dir': 'output'})

    def test_env_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = os.path.join(tmp, '.env')
            with open(env_file, 'w') as f:
                f.write("PREFLOW_GRAPH_TYPE=networkx\nPREFLOW_LOG_LEVEL=debug\n")
            with patch.dict(os.environ, {'PREFLOW_OUTPUT_DIR': 'reports'}, clear=True):
                settings = load_settings(env_file)
        self.assertEqual(settings['graph_type'], 'networkx')
        self.assertEqual(settings['log_level'], 'DEBUG')
        self.assertEqual(settings['output_dir'], 'reports')

    def test_invalid_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = os.path.join(tmp, '.env')
            open(env_file, 'w').close()
            with patch.dict(os.environ, {'PREFLOW_GRAPH_TYPE': 'graph_tool'}, clear=True):
                with self.assertRaises(ValueError):
                    load_settings(env_file)
            with patch.dict(os.environ, {'PREFLOW_LOG_LEVEL': 'LOUD'}, clear=True):
                with self.assertRaises(ValueError):
                    load_settings(env_file)


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.edges_file = os.path.join(self.tmp.name, 'edges.csv')
        pd.DataFrame({
            'from': ['s', 's', 'a', 'b'],
            'to': ['a', 'b', 't', 't'],
            'capacity': [3, 2, 2, 3]
        }).to_csv(self.edges_file, index=False)
        self.output_dir = os.path.join(self.tmp.name, 'out')

    def tearDown(self):
        self.tmp.cleanup()

    def test_writes_results(self):
        status = main([self.edges_file, '--source', 's', '--sink', 't',
                       '--output-dir', self.output_dir, '--compare'])
        self.assertEqual(status, 0)

        results = os.listdir(self.output_dir)
        self.assertEqual(len(results), 1)
        with open(os.path.join(self.output_dir, results[0])) as f:
            report = f.read()
        self.assertIn("Total Flow: 4", report)
        self.assertIn("Minimum Cut Capacity: 4", report)
        self.assertIn("num_paths: 2", report)
        self.assertIn("unique_edges: 4", report)

    def test_compare_with_fractional_capacities(self):
        fractional_file = os.path.join(self.tmp.name, 'fractional.csv')
        pd.DataFrame({
            'from': ['s', 'a'],
            'to': ['a', 't'],
            'capacity': [1.5, 2.5]
        }).to_csv(fractional_file, index=False)
        status = main([fractional_file, '--source', 's', '--sink', 't',
                       '--output-dir', self.output_dir, '--compare'])
        self.assertEqual(status, 0)

    def test_unknown_sink(self):
        status = main([self.edges_file, '--source', 's', '--sink', 'x',
                       '--output-dir', self.output_dir])
        self.assertEqual(status, 1)


if __name__ == '__main__':
    unittest.main()
