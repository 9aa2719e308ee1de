from site_validator.cli import cli

cli(prog_name="site-validator")
