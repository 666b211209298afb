from asyncselect.main import cli

cli()
