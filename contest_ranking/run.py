import sys

from dotenv import load_dotenv

load_dotenv()

from contest_ranking import create_app
from contest_ranking.extensions import db

api = create_app()

print(f"[DB] Using {api.config['SQLALCHEMY_DATABASE_URI']}", file=sys.stderr)


def init_db():
    """Ensure DB tables exist."""
    db.create_all()

# Run DB bootstrap once at startup
with api.app_context():
    init_db()

if __name__ == "__main__":
    api.run(debug=True)
