#!/usr/bin/env python3
import argparse
import logging

from jrandom.comparison import DEFAULT_ULP_TOLERANCE, ComparisonStatus, compare_files
from jrandom.diagnostics import normality_pvalue, summarize_rounds, uniformity_pvalue
from jrandom.run_properties import RunProperties
from jrandom.sequence_runtime import SequenceRuntime
from jrandom.serialization import load_rounds

EXIT_PASS = 0
EXIT_MISMATCH = 1
EXIT_PRODUCER_CRASHED = 2


def generate(conf_path, run_name=None):
    run_properties = RunProperties(conf_path, run_name)
    output_file = SequenceRuntime(run_properties).execute()
    print(f"[jrandom] Wrote '{run_properties.get_run_name()}' (seed={run_properties.get_seed()}) to {output_file}")
    return output_file


def bench(conf_path, run_name=None):
    run_properties = RunProperties(conf_path, run_name)
    elapsed = SequenceRuntime(run_properties).benchmark()
    print(f"[jrandom] {run_properties.get_count()} {run_properties.get_mode()} without I/O: {elapsed:.3f}s")
    return elapsed


def compare(reference, candidate, name="python", ulp_tolerance=None, conf_path=None):
    if ulp_tolerance is None:
        ulp_tolerance = RunProperties(conf_path).get_ulp_tolerance() if conf_path else DEFAULT_ULP_TOLERANCE
    result = compare_files(reference, candidate, name, ulp_tolerance)
    print(f"[jrandom] {result.describe()}")
    if result.passed:
        return EXIT_PASS
    if result.status is ComparisonStatus.PRODUCER_CRASHED:
        return EXIT_PRODUCER_CRASHED
    return EXIT_MISMATCH


def stats(conf_path, run_name=None):
    run_properties = RunProperties(conf_path, run_name)
    if run_properties.get_mode() != "rounds":
        raise SystemExit("[jrandom] stats needs a conf in 'rounds' mode")
    frame = load_rounds(SequenceRuntime(run_properties).execute())
    print(summarize_rounds(frame).to_string())
    if len(frame):
        print(f"[jrandom] nextInt(100) uniformity p-value: {uniformity_pvalue(frame['nextInt100'], 100):.4f}")
        print(f"[jrandom] nextGaussian normality p-value: {normality_pvalue(frame['nextGaussian']):.4f}")
    return frame


def main(argv=None):
    parser = argparse.ArgumentParser(description="Produce and diff java.util.Random-compatible sequences.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING...).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("generate", "Write the configured sequence."),
        ("bench", "Time the configured sequence without I/O."),
        ("stats", "Write the configured rounds and print distribution checks."),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("conf", help="Path to the run config JSON.")
        sub.add_argument("--run-name", default=None, help="Override run name in conf.")

    compare_parser = subparsers.add_parser("compare", help="Diff a candidate stream against a reference.")
    compare_parser.add_argument("reference", help="Reference stream, e.g. java.txt.")
    compare_parser.add_argument("candidate", help="Stream to check.")
    compare_parser.add_argument("--name", default="python", help="Label for the candidate in messages.")
    compare_parser.add_argument("--conf", default=None, help="Run config JSON supplying compare.ulp_tolerance.")
    compare_parser.add_argument("--ulp-tolerance", type=int, default=None,
                                help="Accepted distance between 16-hex-digit double fields (overrides --conf).")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.command == "generate":
        generate(args.conf, args.run_name)
    elif args.command == "bench":
        bench(args.conf, args.run_name)
    elif args.command == "stats":
        stats(args.conf, args.run_name)
    else:
        raise SystemExit(compare(args.reference, args.candidate, args.name, args.ulp_tolerance, args.conf))


if __name__ == "__main__":
    main()
