"""Rule-based validation of dataclass fields."""