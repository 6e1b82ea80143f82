from block_duel.cli import main

main()
