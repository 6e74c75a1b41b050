import os


os.environ.setdefault("FLASK_ENV", "testing")
