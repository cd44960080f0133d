# movieshelf/api/__init__.py
