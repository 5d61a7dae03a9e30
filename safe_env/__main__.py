from safe_env.cli import main

raise SystemExit(main())
