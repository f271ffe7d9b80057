import argparse

from commands.clean import clean
from commands.serve import serve


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("command", type=str, help="Command to run (clean | serve)")
    args = parser.parse_args()
    if args.command == "clean":
        clean()
    elif args.command == "serve":
        serve()
    else:
        print("Invalid command")


if __name__ == "__main__":
    main()
