from sqlalchemy.orm import declarative_base

# Base class for every mapped table
Base = declarative_base()
