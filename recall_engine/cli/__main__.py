from recall_engine.cli.main import run

run()
