"""Logger configuration, rotating file output and stack-aware logging."""