from .build_tool import main

main(prog_name="xtask")
