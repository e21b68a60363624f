# Common utilities package
