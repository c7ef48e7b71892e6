# Db package
