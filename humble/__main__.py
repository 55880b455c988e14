from humble.repl import main

raise SystemExit(main())
