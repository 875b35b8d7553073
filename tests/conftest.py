import pytest

from growth import Canvas, CollisionDetector, GrowthConfig, GrowthModel, SeededRandom


class BoundlessCanvas(Canvas):
    """Canvas whose edge never stops a line."""

    def is_visible(self, x: float, y: float) -> bool:
        return True


def build_model(seed, config, canvas=None):
    canvas = canvas or Canvas(100, 100)
    rnd = SeededRandom(seed)
    detector = CollisionDetector(canvas.is_visible)
    model = GrowthModel(config, rnd, detector, canvas.width, canvas.height)
    model.generate()
    return model


def run_to_completion(model, max_ticks=5000):
    while model.is_active() and model.tick < max_ticks:
        model.grow()
    return model.tick


def snapshot_geometry(model):
    return [
        (line.key, line.origin.to_tuple(), line.tip.to_tuple(), line.angle,
         line.generation, line.parent, line.steps, line.tag, line.state)
        for line in model.lines()
    ]


@pytest.fixture
def steady_config() -> GrowthConfig:
    return GrowthConfig(seed_count=1, p_bifurcation=0.0, expiry_threshold=0.0)


@pytest.fixture
def boundless_canvas() -> Canvas:
    return BoundlessCanvas(100, 100)
