"""Main entry point: run the lazy sequence demonstration scenarios."""

import logging
import sys
import time
from typing import Any, Callable, List

from .config import SequenceConfig, get_config
from .containers import Stack, linked_list
from .data_generator import FakeRecordStream, NaturalNumbers, RandomNumbers
from .frames import dataframe_batches
from .models import ScenarioResult
from .operators import filter_with, first, map_with, materialize, rest, take_until

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def run_scenario(name: str, produce: Callable[[], List[Any]], expected: List[Any]) -> ScenarioResult:
    """Run one scenario and time it."""
    start_time = time.time()
    values = produce()
    result = ScenarioResult(
        name=name, values=values, expected=expected, elapsed_time=time.time() - start_time
    )
    logger.info(f"{name}: {values}")
    return result


def build_scenarios(config: SequenceConfig) -> List[ScenarioResult]:
    """Run the replayable-sequence scenarios."""
    naturals = NaturalNumbers()
    stack = Stack().push(5).push(10).push(2000)
    squares = linked_list([1, 4, 9, 16, 25])

    return [
        run_scenario(
            "Even naturals up to 5",
            lambda: materialize(take_until(lambda x: x > 5, filter_with(lambda x: x % 2 == 0, naturals))),
            [0, 2, 4],
        ),
        run_scenario(
            "Stack traversed twice",
            lambda: materialize(stack) + materialize(stack),
            [2000, 10, 5, 2000, 10, 5],
        ),
        run_scenario(
            "Linked list front to back",
            lambda: materialize(squares),
            [1, 4, 9, 16, 25],
        ),
        run_scenario(
            "Second element via first(rest(...))",
            lambda: [first(rest(squares))],
            [4],
        ),
        run_scenario(
            f"First {config.demo_limit} squares",
            lambda: materialize(map_with(lambda x: x * x, naturals), config.demo_limit),
            [x * x for x in range(config.demo_limit)],
        ),
    ]


def show_streams(config: SequenceConfig):
    """Log two traversals of each stream to show they do not replay."""
    numbers = RandomNumbers(seed=config.seed)
    logger.info(f"Random numbers, first traversal:  {materialize(numbers, config.demo_limit)}")
    logger.info(f"Random numbers, second traversal: {materialize(numbers, config.demo_limit)}")

    records = FakeRecordStream(seed=config.seed)
    total_rows = 0
    for df in dataframe_batches(records, config.batch_size, limit=config.demo_limit):
        total_rows += len(df)
    logger.info(f"Fake records streamed into DataFrames: {total_rows} rows")


def print_summary(results: List[ScenarioResult]):
    """Print summary of scenario results.

    Args:
        results: Scenario results in execution order
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"\n{result.name}: {status}")
        print(f"  Values:    {result.values}")
        if not result.passed:
            print(f"  Expected:  {result.expected}")
        print(f"  Time taken: {result.elapsed_time * 1000:.3f} ms")

    passed = sum(1 for result in results if result.passed)
    print(f"\nScenarios passed: {passed}/{len(results)}")
    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting lazy sequences demo")
    logger.info("=" * 80)

    try:
        config = get_config()
        setup_logging(config.verbose)

        logger.info(f"Demo limit: {config.demo_limit}")
        logger.info(f"Batch size: {config.batch_size}")
        logger.info(f"Seed: {config.seed}")

        logger.info("\n" + "-" * 80)
        logger.info("STEP 1: Replayable sequences")
        logger.info("-" * 80)
        results = build_scenarios(config)

        logger.info("\n" + "-" * 80)
        logger.info("STEP 2: Streams")
        logger.info("-" * 80)
        show_streams(config)

        print_summary(results)

        if not all(result.passed for result in results):
            logger.error("\nSome scenarios did not produce the expected values")
            return 1

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
