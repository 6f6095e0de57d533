from rich.console import Console

# soft_wrap keeps one record per line regardless of terminal width
console = Console(soft_wrap=True, highlight=False)
