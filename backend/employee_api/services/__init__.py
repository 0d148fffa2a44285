"""Services — request handlers that orchestrate repositories around pure core logic."""
