from blocklist.app.main import run

run()
