from tasklist.main import run

run()
