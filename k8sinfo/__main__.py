from k8sinfo.cli import main

main()
