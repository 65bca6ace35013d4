from stylegen.main import app

app()
