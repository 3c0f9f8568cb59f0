from nethermind.ethcall.cli import ethcall_cli

if __name__ == "__main__":
    ethcall_cli()
