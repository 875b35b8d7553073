from conftest import build_model, run_to_completion
from growth import Canvas, GrowthConfig
from rendering import export_forest_data, forest_segments, load_forest_data


class TestExportForestData:
    def test_export_and_load(self, tmp_path) -> None:
        config = GrowthConfig(seed_count=2, p_bifurcation=0.04, expiry_threshold=0.0005)
        model = build_model(21, config, Canvas(60, 40))
        run_to_completion(model)
        path = tmp_path / 'nested' / 'forest.json'

        exported = export_forest_data(model, str(path), seed=21)
        loaded = load_forest_data(str(path))

        assert loaded == exported
        assert loaded['seed'] == 21
        assert loaded['source_width'] == 60
        assert loaded['source_height'] == 40
        assert loaded['tick'] == model.tick
        assert loaded['config'] == {
            'seed_count': 2, 'p_bifurcation': 0.04, 'expiry_threshold': 0.0005
        }
        assert len(loaded['seeds']) == 2

        for seed_data, seed in zip(loaded['seeds'], model.seeds):
            assert seed_data['angle'] == seed.angle
            assert len(seed_data['lines']) == len(seed.lines)
            root = seed_data['lines'][0]
            assert root['parent'] is None
            assert root['generation'] == 0
            for line_data, line in zip(seed_data['lines'], seed.lines):
                assert line_data['origin'] == [line.origin.x, line.origin.y]
                assert line_data['tip'] == [line.tip.x, line.tip.y]
                assert line_data['steps'] == line.steps
                assert line_data['tag'] == line.tag
                assert line_data['state'] in ('expired', 'collided')

    def test_segments(self, tmp_path) -> None:
        model = build_model(2, GrowthConfig(seed_count=3), Canvas(60, 60))
        for _ in range(10):
            model.grow()
        data = export_forest_data(model, str(tmp_path / 'forest.json'))
        segments = forest_segments(data)
        assert len(segments) == model.line_count
        assert segments[0] == (model.seeds[0].root.origin.to_tuple(), model.seeds[0].root.tip.to_tuple())
        assert data['seed'] is None

    def test_single_seed_run_keeps_integer_seed(self, tmp_path) -> None:
        model = build_model(21, GrowthConfig(seed_count=1), Canvas(60, 40))
        path = tmp_path / 'forest.json'
        data = export_forest_data(model, str(path), seed=21)
        assert data['seed'] == 21
        assert load_forest_data(str(path))['seed'] == 21
        assert len(data['seeds']) == 1
