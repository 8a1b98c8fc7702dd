"""Pattern implementations grouped by family.

Each module holds the participating classes of one pattern plus a
``run_demo`` function that narrates a scenario into the active transcript.
"""
