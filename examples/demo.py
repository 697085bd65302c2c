# EXAMPLE: Demo
#
# read() prints the prompt, reads one line and parses it into the requested type.
# Errors are raised as ReadError, so each program decides how to handle bad input.

from tinyinput.reader import read, read_or_default


x = read("Enter integer: ", int)

# read_or_default() falls back to the type's zero value (0.0 here) on bad input
y = read_or_default("Enter float: ", float)

# str is the default target type
s = read("Enter string: ")

print(f"x = {x}, y = {y}, s = {s}")
