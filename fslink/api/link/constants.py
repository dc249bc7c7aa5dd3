"""Names of the on-disk link database."""

DB_DIRNAME = ".fslink"
DB_FILENAME = "links"
