from masplit.cli import masplit_command


def main():
    """Run the masplit command line interface"""
    masplit_command()


if __name__ == "__main__":
    main()
