from cli.main import filehash_cli


if __name__ == '__main__':
    filehash_cli()
