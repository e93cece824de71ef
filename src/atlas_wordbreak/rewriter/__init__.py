"""
Adapter do host: `WordBreakCompoundRewriterFactory` (validate/configure/engine).
"""
