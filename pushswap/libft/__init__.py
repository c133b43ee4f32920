"""Small character, string, memory, list, output, formatting and line-reading helpers."""