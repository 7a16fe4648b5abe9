from quiztrainer.cli.main import main

main()
