"""
Forest Growth Script

Grows a line forest from an integer seed until every line has stopped.

Configuration is loaded from config/pipeline.json (defaults when missing);
command-line flags override it. All output paths are derived from the run
name and the seed.

Outputs:
- Forest data (.json) for rendering elsewhere
- Final forest plot (.png)
- Growth statistics (.png)
- Growth animation (.gif), when animate is set
"""

import argparse

from config import load_config, ForestRenderConfig
from growth import Canvas, GrowthConfig, Simulation
from growth.profiling import profiler
from growth.visualization import visualize_forest, animate_growth, plot_growth_statistics
from rendering import export_forest_data


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grow a branching line forest from a seed.")
    parser.add_argument('--config', type=str, default='config/pipeline.json',
                        help='Path to the pipeline JSON config (default: config/pipeline.json)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: from config, else derived from the clock)')
    parser.add_argument('--max-ticks', type=int, default=None,
                        help='Stop after this many ticks even if lines are still growing')
    parser.add_argument('--animate', action='store_true', help='Also save a growth animation')
    parser.add_argument('--show', action='store_true', help='Open the plots in a window')
    parser.add_argument('--profile', action='store_true', help='Print timing of the hot paths at exit')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    pipeline = load_config(args.config)
    if args.seed is not None:
        pipeline.random_seed = args.seed
    if args.max_ticks is not None:
        pipeline.max_ticks = args.max_ticks
    pipeline.animate = pipeline.animate or args.animate
    pipeline.show = pipeline.show or args.show
    pipeline.profile = pipeline.profile or args.profile

    if pipeline.profile:
        profiler.enable()

    pipeline.create_output_dirs()

    canvas = Canvas(pipeline.canvas_width, pipeline.canvas_height)
    growth_config = None if pipeline.randomize_growth else GrowthConfig.from_pipeline(pipeline)
    simulation = Simulation(pipeline.random_seed, config=growth_config, canvas=canvas)
    simulation.init()

    print(f"Growing forest {pipeline.run_name}")
    print(f"  Seed: {pipeline.random_seed}")
    print(f"  Canvas: {canvas.width}x{canvas.height}")
    print()

    render_config = ForestRenderConfig()

    if pipeline.animate:
        animate_growth(
            simulation,
            render_config=render_config,
            max_ticks=pipeline.max_ticks,
            save_path=str(pipeline.animation_path),
            frame_skip=pipeline.frame_skip,
            show=pipeline.show
        )
    else:
        simulation.run(max_ticks=pipeline.max_ticks)

    model = simulation.model

    export_forest_data(model, str(pipeline.forest_data_path), seed=pipeline.random_seed)
    print(f"Exported forest data to: {pipeline.forest_data_path}")

    visualize_forest(
        model,
        render_config=render_config,
        save_path=str(pipeline.forest_image_path),
        show=pipeline.show
    )
    plot_growth_statistics(model, save_path=str(pipeline.stats_image_path), show=pipeline.show)

    print("\nForest complete!")
    print(f"  Ticks: {model.tick}")
    print(f"  Lines: {model.line_count}")
    print(f"  Data: {pipeline.forest_data_path}")
    print(f"  Image: {pipeline.forest_image_path}")


if __name__ == '__main__':
    main()
