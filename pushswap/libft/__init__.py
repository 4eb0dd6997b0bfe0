"""Character, memory, string, conversion, list and file-descriptor I/O helpers."""