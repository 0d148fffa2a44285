"""Infrastructure — IO shell: database engine, repositories, logging setup."""
