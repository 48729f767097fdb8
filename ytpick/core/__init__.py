"""
Core selection engine.

The classifier and preset resolver are pure functions over the catalog; the
`SelectionFlow` drives the prompts and yields a `SelectionResult`, which the
command assembler turns into a `CommandSpec` for yt-dlp.
"""
