import click

from .commands.generate import generate_command
from .commands.map import map_command
from .commands.profile import profile_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    """Map product CSV exports onto Digital Product Passport records."""


app.add_command(profile_command, name="profile")
app.add_command(map_command, name="map")
app.add_command(validate_command, name="validate")
app.add_command(generate_command, name="generate")
__all__ = ["app"]
