"""Thread-safe list and string-keyed map."""