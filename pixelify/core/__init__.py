"""pixelify.core — Foundation layer.

Contains colour encoding, compositing, sampling, the HTML document
generator, the pipeline session, text sinks, and the report builder.
This module has NO dependencies on pixelify.commands or pixelify.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
