from kafkawrite.cli import main

main()
