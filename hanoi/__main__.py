from hanoi.main import app

app()
