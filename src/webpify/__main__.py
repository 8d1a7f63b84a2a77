"""Allow ``python -m webpify``."""

from webpify.cli.cli import app

if __name__ == "__main__":
    app(prog_name="webpify")
