from healthcheck.cli import app

app(prog_name="healthcheck")
