import sys
import time
import logging
from typing import Dict, Any
from colorama import Fore, Style, just_fix_windows_console
from .cli import parse_arguments, merge_cli_options
from .config import configure_logging, read_config
from .constants import DONE_ICON
from .errors import ConfigError
from .progress import Mode, ProgressBar

def run_steps(bar: ProgressBar, steps: int, delay: float, halfway_message: str = None):
    """Drive a determinate bar from 0 to steps."""
    for step in range(steps + 1):
        if halfway_message and step == steps // 2:
            bar.set_message(halfway_message)
        bar.set_current_val(step)
        time.sleep(delay)

def run_demo(config: Dict[str, Any]) -> float:
    """Run both modes back to back.

    Returns:
        Seconds spent in the demo
    """
    started = time.monotonic()
    steps = config.get('max', 20)

    bar = ProgressBar("Progress Test", steps, config=config)
    run_steps(bar, steps, config.get('delay', 0.1))

    bar.set_mode(Mode.INDETERMINATE, True)
    bar.set_message(f"Waiting for {config.get('wait', 10.0):g} seconds...")
    bar.start()
    time.sleep(config.get('wait', 10.0))
    bar.set_message("Finished waiting.")
    bar.set_mode(Mode.DETERMINATE, True)

    bar.set_message("Testing first half of progress")
    bar.set_max_val(steps)
    run_steps(bar, steps, config.get('delay', 0.1), "More than half done")
    bar.set_message("Test complete")
    bar.finish(True)

    return time.monotonic() - started

def main():
    """Entry point for the pbar-demo tool."""
    # Parse command-line arguments
    args = parse_arguments()
    
    # Configure logging
    configure_logging(args.debug)
    
    # Read config and merge with CLI options
    config = read_config()
    config = merge_cli_options(args, config)

    just_fix_windows_console()
    try:
        elapsed = run_demo(config)
    except ConfigError as e:
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.stderr.write('\n')
        sys.exit(130)

    if not config.get('quiet'):
        sys.stderr.write(f"{Fore.GREEN}{DONE_ICON}{Style.RESET_ALL} Demo finished in {elapsed:.1f}s\n")

if __name__ == '__main__':
    main()
