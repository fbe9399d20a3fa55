import os
import sys
import argparse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from benchmarks.benchmark import Benchmark

def main():
    parser = argparse.ArgumentParser(description="Run step producer benchmarks")
    parser.add_argument("--sizes", type=int, nargs="+", default=[2 ** k for k in range(2, 17)],
                      help="Array sizes to test (powers of two from 4 to 65536 by default)")
    parser.add_argument("--queries", type=int, default=20,
                      help="Present and absent targets searched per array size")
    parser.add_argument("--seed", type=int, default=0,
                      help="Seed for the generated arrays and targets")
    parser.add_argument("--output-dir", default="benchmark_results",
                      help="Directory for benchmark results")
    args = parser.parse_args()

    benchmark = Benchmark(args.output_dir, seed=args.seed)

    print("Running benchmarks...")
    print("===================")
    print(f"Array sizes: {len(args.sizes)}")
    print(f"Targets per size: {2 * args.queries + 2}")
    print()

    benchmark.run_benchmark(sizes=args.sizes, queries_per_size=args.queries)

    print("\nGenerating reports...")
    benchmark.generate_report()

    print(f"\nBenchmark results saved to {args.output_dir}")
    print("Files generated:")
    print(f"- {args.output_dir}/comparisons.png")
    print(f"- {args.output_dir}/time.png")
    print(f"- {args.output_dir}/benchmark_results.csv")
    print(f"- {args.output_dir}/benchmark_report.txt")

if __name__ == "__main__":
    main()
