from blogconf.cli.click_app import cli

__all__ = ["cli"]
