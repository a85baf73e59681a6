from sshauth.cli import app

app(prog_name="sshauth")
