"""Create all tables in the portal database."""

from portal.factory import create_web_app
from portal.services import datastore

app = create_web_app()
with app.app_context():
    datastore.create_all()
