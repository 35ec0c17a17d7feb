"""Main entry point for Precip Compare."""

import sys
from loguru import logger


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print("Usage: python main.py [ui|years|compare <year> [markdown|json]]")
        sys.exit(1)

    cmd = sys.argv[1]

    if cmd == "ui":
        import subprocess
        logger.info("Starting Streamlit UI...")
        subprocess.run(["streamlit", "run", "precip_compare/ui/app.py", "--server.port", "8501"])

    elif cmd in ("years", "compare"):
        from precip_compare.core import Comparator, format_output
        from precip_compare.data_sources import DatasetLoadError, load_dataset
        from precip_compare.utils.logger import setup_logging

        setup_logging()
        try:
            dataset = load_dataset()
        except DatasetLoadError as e:
            logger.error(f"Initialization failed: {e}")
            sys.exit(2)

        if cmd == "years":
            for model in dataset.models():
                years = dataset.years_for_model(model)
                print(f"{model}: {', '.join(str(y) for y in years)}")
            return

        if len(sys.argv) < 3:
            print("Usage: python main.py compare <year> [markdown|json]")
            sys.exit(1)

        style = sys.argv[3] if len(sys.argv) > 3 else "markdown"
        result = Comparator(dataset).compare(int(sys.argv[2]))
        print(format_output(result, style))

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
