# config.py

# Node types: 0 walkable, 1 rock (never walkable), >=2 hidden obstacle classes
PASSABLE = 0
IMPASSABLE = 1
FIRST_HIDDEN_CLASS = 2

# Container sizing
HASH_TABLE_CAPACITY = 1000
MAX_LOAD_FACTOR = 0.5
HEAP_CAPACITY = 100

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
