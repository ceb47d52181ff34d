from afrilex.main import run

run()
