"""Command-line interface for the deck overlay generator."""

import argparse
import sys
import logging
from .config import Config
from .executor import BatchResult
from .pipeline import OverlayPipeline


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.
    
    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Regenerate progress bars, footer links and section navigation on a slide deck.'
    )
    
    parser.add_argument(
        '--config',
        default='configs/config.yaml',
        help='Path to configuration file (default: configs/config.yaml)'
    )
    
    parser.add_argument(
        '--backend',
        choices=['pptx', 'google'],
        help='Document backend (overrides config)'
    )
    
    parser.add_argument(
        '--input',
        help='Path to input .pptx file (overrides config)'
    )
    
    parser.add_argument(
        '--output',
        help='Path to output .pptx file (overrides config; defaults to the input file)'
    )
    
    parser.add_argument(
        '--presentation-id',
        help='Google Slides presentation id (overrides config)'
    )
    
    parser.add_argument(
        '--credentials',
        help='Service account key file for the google backend (overrides config)'
    )
    
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides config)'
    )
    
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> None:
    """Copy command-line overrides into the configuration."""
    overrides = {
        'backend': args.backend,
        'paths.input': args.input,
        'paths.output': args.output,
        'google.presentation_id': args.presentation_id,
        'google.credentials_file': args.credentials,
    }
    for key, value in overrides.items():
        if value:
            config.set(key, value)
    if args.log_level:
        config.set('settings.logging.level', args.log_level)
        logging.getLogger().setLevel(args.log_level)


def run_pptx(config: Config) -> BatchResult:
    """Regenerate overlays in a .pptx file and save it."""
    from .pptx_document import PptxDocument, PptxMutationClient
    
    document = PptxDocument.open(config.input_path)
    result = OverlayPipeline(config).run(document, PptxMutationClient(document))
    document.save(config.output_path)
    return result


def run_google(config: Config) -> BatchResult:
    """Regenerate overlays in a hosted Google Slides presentation."""
    from .google_slides import GoogleSlidesClient, GoogleSlidesDocument, build_slides_service
    
    credentials_file = config.get('google.credentials_file')
    if not credentials_file:
        raise ValueError("google.credentials_file is required for the google backend")
    presentation_id = config.get('google.presentation_id')
    
    service = build_slides_service(str(config._resolve_path_value(credentials_file)))
    document = GoogleSlidesDocument.fetch(service, presentation_id)
    client = GoogleSlidesClient(service, presentation_id)
    return OverlayPipeline(config).run(document, client)


def main(argv=None) -> int:
    """Main entry point for the CLI.
    
    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    
    try:
        config = Config(args.config)
        apply_overrides(config, args)
        config.validate_paths()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        print(f"Please check the configuration file at: {args.config}")
        return 1
    
    print("=" * 60)
    print("Deck Overlay Generator")
    print("=" * 60)
    print(f"Configuration: {args.config}")
    print(f"Backend:       {config.backend}")
    if config.backend == 'google':
        print(f"Presentation:  {config.get('google.presentation_id')}")
    else:
        print(f"Input:         {config.input_path}")
        print(f"Output:        {config.output_path}")
    print("=" * 60)
    
    try:
        if config.backend == 'google':
            result = run_google(config)
        else:
            result = run_pptx(config)
    except Exception as e:
        logging.exception("Error generating overlays")
        print(f"\nError generating overlays: {e}")
        return 1
    
    print("\n" + "=" * 60)
    print(f"Done! {result.operation_count} operations submitted")
    for kind, count in sorted(result.counts().items()):
        print(f"  {kind:<26} {count}")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
