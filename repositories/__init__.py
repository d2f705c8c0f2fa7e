"""
repositories/ - Data Access Layer
==================================
One generic repository (BaseRepository) implements create/read/update/delete;
each entity module only declares its table descriptor, row mapper and
parameter binder.
"""
