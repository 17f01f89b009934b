"""Streaming layer — chunked drivers and the line-wrapping writer.

WHY: Inputs may be arbitrarily large, so nothing above the codecs may
hold a whole stream in memory.

HOW: drivers.py pulls fixed-size chunks from a readable byte source,
runs the scheme's codec and pushes the result to a writable byte sink;
wrapper.py folds encoded output into lines on the way out.

RULES:
- Sources and sinks are binary file-like objects owned by the caller
- Drivers flush but never close the caller's streams
"""
