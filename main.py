# main.py
import argparse
import sys
from solid.examples import EXAMPLES, TITLES, run_example
import config


def build_parser():
    parser = argparse.ArgumentParser(description="Run the SOLID principle examples")
    parser.add_argument("examples", nargs="*", metavar="EXAMPLE",
                        help="examples to run (default: all, in %s order)" % "/".join(config.EXAMPLE_ORDER))
    parser.add_argument("--list", action="store_true", help="list the available examples and exit")
    return parser


def main(argv=None):
    """
    SOLID examples main function.
    Runs the requested examples in order and returns an exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    unknown = [name for name in args.examples if name not in EXAMPLES]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)} "
                     f"(choose from {', '.join(config.EXAMPLE_ORDER)})")

    if args.list:
        for name in config.EXAMPLE_ORDER:
            print(f"{name}  {TITLES[name]}")
        return 0

    names = args.examples or config.EXAMPLE_ORDER
    exit_code = 0

    try:
        for name in names:
            run_example(name)
    except KeyboardInterrupt:
        print("\n[Main] Stopped by user...")
        exit_code = 130
    except Exception as e:
        print(f"\n[Main] Error: {e}")
        import traceback
        traceback.print_exc()
        exit_code = 1
    finally:
        print("[Main] Done.")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
