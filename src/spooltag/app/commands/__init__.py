from spooltag.app.commands import chip

COMMAND_MODULES = [chip]
