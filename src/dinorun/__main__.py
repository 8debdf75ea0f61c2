from dinorun.simulator.main import main

main()
