import sys

import folder_hash.cli.folder_hash as folder_hash_cli


def main():
    sys.exit(folder_hash_cli.main())


if __name__ == "__main__":
    main()
