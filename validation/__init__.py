"""Upload classification: extension taxonomy, content sniffing and validators."""
