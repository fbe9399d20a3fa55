import os
import time
import random
from typing import List, Dict
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from stepsearch.search.registry import ALGORITHMS


class Benchmark:
    def __init__(self, output_dir: str = "benchmark_results", seed: int = 0):
        self.output_dir = output_dir
        self.algorithms = ALGORITHMS
        self.rng = random.Random(seed)
        self.results: Dict[str, List[Dict]] = {}
        os.makedirs(output_dir, exist_ok=True)

    def generate_array(self, size: int) -> List[int]:
        return sorted(self.rng.randint(1, size * 4) for _ in range(size))

    def generate_targets(self, array: List[int], queries: int) -> List[int]:
        values = set(array)
        present = [self.rng.choice(array) for _ in range(queries)]
        absent = [value for value in (self.rng.randint(1, len(array) * 4) for _ in range(queries * 4))
                  if value not in values][:queries]
        # Below and above the whole range
        return present + absent + [0, len(array) * 4 + 1]

    def drive(self, algorithm, array: List[int], target: int) -> Dict:
        producer = algorithm.create_producer(array, target)
        steps = 1
        start = time.perf_counter()
        step, has_more = producer.resume()
        while has_more:
            step, has_more = producer.resume()
            steps += 1
        elapsed = time.perf_counter() - start
        return {
            "comparisons": step.comparison_count,
            "steps": steps,
            "time": elapsed,
            "found": step.outcome.is_found,
        }

    def run_benchmark(self, sizes: List[int], queries_per_size: int = 20) -> None:
        self.results.clear()
        total_steps = len(sizes) * len(self.algorithms)
        current_step = 0

        for size in sizes:
            array = self.generate_array(size)
            targets = self.generate_targets(array, queries_per_size)
            for identifier, algorithm in self.algorithms.items():
                current_step += 1
                print(f"Running benchmark: {current_step}/{total_steps} - Algorithm: {identifier}, Array Size: {size}", end='\r')

                runs = [self.drive(algorithm, array, target) for target in targets]
                _, theoretical_max = algorithm.comparison_bounds(size)
                stats = {
                    "array_size": size,
                    "avg_comparisons": sum(run["comparisons"] for run in runs) / len(runs),
                    "max_comparisons": max(run["comparisons"] for run in runs),
                    "avg_steps": sum(run["steps"] for run in runs) / len(runs),
                    "avg_time_us": 1e6 * sum(run["time"] for run in runs) / len(runs),
                    "theoretical_max": theoretical_max,
                    "found_rate": sum(run["found"] for run in runs) / len(runs),
                }
                self.results.setdefault(identifier, []).append(stats)

        print("\nBenchmark completed.")

    def plot_figure(self, data, x, y, xlabel, ylabel, filename, log_scale_x=False, log_scale_y=False):
        plt.figure(figsize=(15, 10))
        df = pd.DataFrame(data)
        for algo in df["algorithm"].unique():
            algo_data = df[df["algorithm"] == algo]
            plt.plot(algo_data[x], algo_data[y], marker='o', label=algo)
        if log_scale_x:
            plt.xscale('log')
        if log_scale_y:
            plt.yscale('log')
        plt.xlabel(xlabel + " [Log Scale]" if log_scale_x else xlabel)
        plt.ylabel(ylabel + " [Log Scale]" if log_scale_y else ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def to_frame(self) -> pd.DataFrame:
        data = []
        for algo_name, results in self.results.items():
            for result in results:
                data.append(dict(result, algorithm=algo_name))
        return pd.DataFrame(data)

    def generate_report(self) -> pd.DataFrame:
        df = self.to_frame()
        print(df.head())
        self.plot_figure(
            data=df,
            x="array_size",
            y="avg_comparisons",
            xlabel="Array Size",
            ylabel="Average Comparisons",
            filename=os.path.join(self.output_dir, "comparisons.png"),
            log_scale_x=True,
            log_scale_y=True,
        )
        self.plot_figure(
            data=df,
            x="array_size",
            y="avg_time_us",
            xlabel="Array Size",
            ylabel="Average Time to Completion (us)",
            filename=os.path.join(self.output_dir, "time.png"),
            log_scale_x=True,
            log_scale_y=True,
        )

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w') as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            f.write(f"{'Algorithm':<20}{'Avg Comparisons':<20}{'Max Comparisons':<20}{'Theoretical Max':<20}{'Avg Time (us)':<20}\n")
            f.write("=" * 100 + "\n")
            for algo in df["algorithm"].unique():
                algo_data = df[df["algorithm"] == algo]
                f.write(
                    f"{algo:<20}{algo_data['avg_comparisons'].mean():<20.2f}"
                    f"{algo_data['max_comparisons'].max():<20}"
                    f"{algo_data['theoretical_max'].max():<20}"
                    f"{algo_data['avg_time_us'].mean():<20.2f}\n"
                )
        return df
