"""Built-in slash commands for ide_jump."""
