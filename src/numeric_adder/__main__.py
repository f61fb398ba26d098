from numeric_adder.cli import main

main(prog_name="numeric-adder")
