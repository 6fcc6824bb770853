import logging
import time
from typing import Any, Dict, List

import numpy as np

from fgt.core.base import ClusteringBase, ClusteringParams
from fgt.core.gonzalez import GonzalezClustering
from fgt.core.transform import direct_gauss_transform, ifgt_transform
from fgt.data.synthetic import GaussProblem
from fgt.metrics.metrics import max_relative_error, speedup, throughput
from fgt.metrics.timers import Timer
from fgt.utils.logging import format_problem_prefix


class BenchmarkRunner:
    """
    Запускает серию прогонов IFGT на одной задаче и сравнивает с прямой суммой.

    Каждый прогон: partition → compute_C → ifgt_transform. Прямая сумма
    считается один раз и служит эталоном точности и времени.
    """

    def __init__(
        self,
        problem: GaussProblem,
        params: ClusteringParams,
        n_clusters: int,
        logger: logging.Logger | None = None,
        clusterer_cls: type = GonzalezClustering,
    ) -> None:
        self.problem = problem
        self.params = params
        self.n_clusters = n_clusters
        self.logger = logger
        self.clusterer_cls = clusterer_cls

        meta: Dict[str, Any] = dict(problem.metadata)
        meta["K"] = n_clusters
        meta["bandwidth"] = params.bandwidth
        self._prefix = format_problem_prefix(meta)

    def _create_clusterer(self, seed: int) -> ClusteringBase:
        return self.clusterer_cls(
            n_clusters=self.n_clusters,
            params=self.params,
            rng=seed,
            logger=self.logger,
        )

    def run(self, repeats: int = 5, warmup: int = 1) -> Dict[str, Any]:
        """
        Запускает warmup + repeats прогонов и возвращает агрегированную статистику.

        :param repeats: количество измеряемых прогонов
        :param warmup: количество «разогревочных» запусков
        :return: словарь с таймингами, ускорением и ошибкой
        """
        if repeats < 1:
            raise ValueError("repeats must be at least 1")
        X, Y, q = self.problem.X, self.problem.Y, self.problem.q

        if self.logger:
            self.logger.info(f"{self._prefix} Direct sum over {Y.shape[0]} targets")
        with Timer() as t_direct:
            exact = direct_gauss_transform(X, Y, q, self.params.bandwidth)

        warmup_start = time.perf_counter()
        for w in range(warmup):
            model = self._create_clusterer(seed=w).partition(X)
            ifgt_transform(model, Y, C=model.compute_C(q))
        warmup_elapsed = time.perf_counter() - warmup_start

        runs: List[Dict[str, float]] = []
        for run_idx in range(1, repeats + 1):
            if self.logger:
                self.logger.info(f"{self._prefix} Run {run_idx}/{repeats}")

            clusterer = self._create_clusterer(seed=run_idx)
            with Timer() as t_partition:
                model = clusterer.partition(X)
            with Timer() as t_coeffs:
                C = model.compute_C(q)
            with Timer() as t_eval:
                approx = ifgt_transform(model, Y, C=C)

            t_total = t_partition.elapsed + t_coeffs.elapsed + t_eval.elapsed
            runs.append(
                {
                    "run_idx": float(run_idx),
                    "T_partition": t_partition.elapsed,
                    "T_cluster": clusterer.t_cluster,
                    "T_coefficients": t_coeffs.elapsed,
                    "T_evaluate": t_eval.elapsed,
                    "T_total": t_total,
                    "rx": model.rx,
                    "p_max": float(model.p_max),
                    "bound_met": float(model.bound_met),
                    "max_rel_error": max_relative_error(approx, exact, q),
                }
            )

        totals = [r["T_total"] for r in runs]
        errors = [r["max_rel_error"] for r in runs]
        t_total_avg = float(np.mean(totals))

        stats: Dict[str, Any] = {
            "T_direct": t_direct.elapsed,
            "T_total_avg": t_total_avg,
            "T_total_std": float(np.std(totals)),
            "T_total_min": float(np.min(totals)),
            "T_partition_avg": float(np.mean([r["T_partition"] for r in runs])),
            "T_coefficients_avg": float(np.mean([r["T_coefficients"] for r in runs])),
            "T_evaluate_avg": float(np.mean([r["T_evaluate"] for r in runs])),
            "speedup": speedup(t_direct.elapsed, t_total_avg),
            "throughput_pairs": throughput(X.shape[0], Y.shape[0], t_total_avg),
            "max_rel_error_max": float(np.max(errors)),
            "p_max": int(runs[-1]["p_max"]),
            "runs": runs,
            "warmup_seconds": warmup_elapsed,
        }

        if self.logger:
            self.logger.info(
                f"{self._prefix} Timing: "
                f"T_direct={stats['T_direct']:.6f}s, "
                f"T_total_avg={stats['T_total_avg']:.6f}s, "
                f"speedup={stats['speedup']:.2f}, "
                f"max_rel_error={stats['max_rel_error_max']:.2e}"
            )

        return stats
