"""core/ -- Configuration kernel. No imports from api/ or auth/."""
