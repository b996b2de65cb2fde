"""JSON configuration files, dot-path access and environment prefixes."""