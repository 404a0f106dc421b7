"""Translation engines shipped with LocForge."""
