# main.py
from pathlib import Path
import argparse
import json
import logging

from fgt.core.base import ClusteringParams
from fgt.data.synthetic import make_problem
from fgt.experiments.config import PRESETS, PresetId
from fgt.experiments.runner import BenchmarkRunner
from fgt.utils.logging import setup_logger

RESULTS_JSON = Path("fgt_benchmark_results.json")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--preset",
        type=str,
        choices=[p.value for p in PresetId] + ["all"],
        default=PresetId.SMALL_2D.value,
        help="Какую задачу запустить (all или имя пресета).",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=None,
        help="Количество измеряемых прогонов (по умолчанию из пресета).",
    )
    parser.add_argument(
        "--refine",
        action="store_true",
        help="Пересчитать порядок усечения по фактическому радиусу кластеров.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=RESULTS_JSON,
        help="Файл NDJSON для результатов.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Подробный лог (DEBUG), включая каждую итерацию Гонсалеса.",
    )
    args = parser.parse_args()

    logger = setup_logger(logging.DEBUG if args.verbose else logging.INFO)

    if args.preset == "all":
        configs = list(PRESETS.values())
    else:
        configs = [PRESETS[PresetId(args.preset)]]

    args.output.write_text("", encoding="utf-8")
    for cfg in configs:
        logger.info(f"Preset {cfg.id.value}: {cfg.description}")
        problem = make_problem(
            N=cfg.N, D=cfg.D, K=cfg.blobs, n_targets=cfg.n_targets
        )
        params = ClusteringParams(
            bandwidth=cfg.bandwidth,
            epsilon=cfg.epsilon,
            refine_truncation=args.refine,
        )
        runner = BenchmarkRunner(problem, params, n_clusters=cfg.K, logger=logger)
        stats = runner.run(
            repeats=args.repeats if args.repeats is not None else cfg.repeats,
            warmup=cfg.warmup,
        )

        record = {
            "preset": cfg.id.value,
            "problem": problem.metadata,
            "K": cfg.K,
            "bandwidth": cfg.bandwidth,
            "epsilon": cfg.epsilon,
            "refine_truncation": args.refine,
            "timing": stats,
        }
        with open(args.output, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False))
            f.write("\n")

    logger.info(f"Benchmark results saved to {args.output}")


if __name__ == "__main__":
    main()
