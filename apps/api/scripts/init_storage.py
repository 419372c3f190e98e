"""Create the storage tables, optionally clearing a stale signed-in session."""
from __future__ import annotations

import argparse

from showcase.core.config import get_settings
from showcase.db.session import build_engine, build_session_factory, init_storage
from showcase.repositories.storage import KeyValueStore
from showcase.services.auth import SESSION_KEY


def main() -> None:
	parser = argparse.ArgumentParser(description=__doc__)
	parser.add_argument("--reset-session", action="store_true", help="forget the persisted signed-in user")
	args = parser.parse_args()

	settings = get_settings()
	engine = build_engine(settings.storage_url)
	try:
		init_storage(engine)
		if args.reset_session:
			KeyValueStore(build_session_factory(engine)).delete(SESSION_KEY)
	finally:
		engine.dispose()
	print(f"Storage ready at {settings.storage_url}.")


if __name__ == "__main__":
	main()
