"""
Allow running the package with: python -m imgcollide

Examples:
    python -m imgcollide /path/to/photos        # Report collisions
    python -m imgcollide /path/to/photos -r 16  # Finer fingerprint grid
    python -m imgcollide config                 # Show configuration
    python -m imgcollide config --init          # Create example config file
"""

import sys


def show_config(argv) -> int:
    from .user_config import get_user_config

    config = get_user_config()

    if '--init' in argv or '-i' in argv:
        if config.create_example_config():
            print("Created example configuration file at:")
            print(f"  {config.config_file_path}")
            return 0
        print("Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: found")
    else:
        print("Status: not found (using defaults)")
        print("\nRun 'python -m imgcollide config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  default_side: {config.default_side}")
    print(f"  use_dct: {config.use_dct}")
    print(f"  default_workers: {config.default_workers}")
    print(f"  max_image_pixels: {config.max_image_pixels:,}")
    return 0


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        sys.exit(show_config(sys.argv[2:]))

    from .cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
