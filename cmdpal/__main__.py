from cmdpal.cli import run_cli

run_cli()
