""" Package for the optional PyQt5 preview window. Nothing outside this package and main_qt imports PyQt5. """
