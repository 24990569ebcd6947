from mean_lint import main

main()
