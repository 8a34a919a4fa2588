"""Command-line interface for flight crew workbook conversion."""

import argparse
import logging
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.generators.micro_airline import generate_micro_airline, print_instance_summary
from models import FlightCrewSolution
from persistence import FlightCrewFileError, read, write

INSTANCES = {
    "micro_airline": generate_micro_airline,
}


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def load_solution(input_file: str = None, instance: str = "micro_airline") -> FlightCrewSolution:
    """Read the input workbook, or generate the sample instance."""
    logger = logging.getLogger(__name__)

    if input_file:
        return read(input_file)

    generator = INSTANCES.get(instance)
    if generator is None:
        raise ValueError(f"Unknown instance ({instance}), expected one of {sorted(INSTANCES)}")

    logger.info(f"Generating {instance} instance...")
    return generator()


def run(
    input_file: str = None,
    instance: str = "micro_airline",
    output_file: str = None,
    verbose: bool = True
) -> FlightCrewSolution:
    """Load a solution, report on it and optionally write it out."""
    logger = logging.getLogger(__name__)

    solution = load_solution(input_file, instance)

    if verbose:
        if input_file:
            solution.print_summary()
        else:
            print_instance_summary(solution)

        # Print integrity checks
        print("\nIntegrity Checks:")
        print("-" * 40)
        for check, satisfied in solution.check_integrity().items():
            status = "PASS" if satisfied else "FAIL"
            print(f"  {check}: {status}")

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        write(solution, output_path)
        logger.info(f"Solution saved to {output_file}")

    return solution


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Flight crew scheduling workbook reader and writer"
    )

    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Input .xlsx workbook (default: generate --instance)"
    )

    parser.add_argument(
        "--instance",
        type=str,
        default="micro_airline",
        choices=sorted(INSTANCES),
        help="Sample instance used without --input (default: micro_airline)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output .xlsx workbook"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress summary output"
    )

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    try:
        run(
            input_file=args.input,
            instance=args.instance,
            output_file=args.output,
            verbose=not args.quiet
        )
    except FlightCrewFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
