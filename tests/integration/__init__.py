"""
Integration tests reading back what the stdlib backend renders for records
emitted through lazylog loggers.
"""
