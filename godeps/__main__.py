from godeps.cli import app

app()
