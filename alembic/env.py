from logging.config import fileConfig
from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from alembic import context

from app.config import get_settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Connection details come from the same settings the API uses
db_config = get_settings().db_config
sqlalchemy_url = URL.create(
    "postgresql+psycopg2",
    username=db_config["user"],
    password=db_config["password"],
    host=db_config["host"],
    port=db_config["port"],
    database=db_config["dbname"],
)
config.set_main_option("sqlalchemy.url", sqlalchemy_url.render_as_string(hide_password=False).replace("%", "%%"))

# Raw SQL migrations, nothing to autogenerate from
target_metadata = None

def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True, compare_type=True)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(config.get_main_option("sqlalchemy.url"), future=True)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
