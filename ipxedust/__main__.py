from ipxedust.main import run

run()
