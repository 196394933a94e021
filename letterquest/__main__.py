from letterquest.game import cli

cli()
