"""
# Demo programs

Small programs that build backing storage and drive the lazyrange API. Each
module exposes an `execute()` function and is run with
`lazyrange demo <module>`. Parameters come from the `[demo]` and `[display]`
sections of the configuration.
"""
