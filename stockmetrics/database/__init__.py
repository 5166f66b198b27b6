from stockmetrics.database.base import Base
from stockmetrics.database.engine import build_engine, engine
from stockmetrics.database.session import SessionLocal

__all__ = ["Base", "SessionLocal", "build_engine", "engine"]
