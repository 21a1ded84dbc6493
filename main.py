from cli.app import cli


def main():
    """Entry point for check_cloudwatch. Delegates to cli.app:cli."""
    cli()


if __name__ == "__main__":
    main()
