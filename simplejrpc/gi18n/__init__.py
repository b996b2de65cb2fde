"""Translation files, languages and message lookup."""