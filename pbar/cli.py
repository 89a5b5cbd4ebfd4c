"""Module for handling command-line arguments of the demo driver."""
import argparse
from typing import List, Dict, Any, Optional
from .constants import INDICATOR_PRESETS

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.
    
    Args:
        argv: List of command-line arguments (defaults to sys.argv[1:])
        
    Returns:
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        description='Show both progress bar modes on stderr.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    
    parser.add_argument(
        '--max',
        type=int,
        default=20,
        help='Number of steps in each determinate run'
    )
    
    parser.add_argument(
        '--wait',
        type=float,
        default=10.0,
        help='Seconds to show the indeterminate animation'
    )
    
    parser.add_argument(
        '--delay',
        type=float,
        default=0.1,
        help='Seconds to sleep between determinate steps'
    )
    
    parser.add_argument(
        '--char',
        choices=INDICATOR_PRESETS,
        help='Indicator character'
    )
    
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Track progress without drawing anything'
    )
    
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    
    return parser.parse_args(argv)

def merge_cli_options(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge command-line arguments into configuration.
    
    Args:
        args: Parsed command-line arguments
        config: Configuration dictionary
        
    Returns:
        Updated configuration dictionary
    """
    config.update({
        'max': args.max,
        'wait': args.wait,
        'delay': args.delay,
        'debug': args.debug
    })

    # Only override file settings when given on the command line
    if args.char is not None:
        config['indicatorChar'] = args.char
    if args.quiet:
        config['quiet'] = True
        
    return config
