# Main script: mirror the online book into a local directory
import sys
import logging

from config_loader import load_config
from errors import MirrorError
from logger_setup import setup_logging
from mirror_pipeline import run_mirror


# --- Main Execution ---
def main(argv=None):
    """Loads configuration, runs one mirror pass and returns the exit status."""
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None

    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config['log_file'], config['log_level'])
    logging.info("--- Starting Book Mirror ---")
    logging.info(f"Mirroring {config['toc_url']} into {config['output_dir']}")

    try:
        toc = run_mirror(config)
    except MirrorError as e:
        logging.error(f"Mirror run aborted: {e}")
        return 1

    logging.info(f"--- Book Mirror Finished: {len(toc)} pages saved ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
