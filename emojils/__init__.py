"""Language server that translates words on hover and suggests emoji on completion."""
