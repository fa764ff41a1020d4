from .cli import app

app(prog_name="mpris2mqtt")
