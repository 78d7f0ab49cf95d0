from lumen.types.cons import to_lisp_list
from lumen.types.symbol import Symbol


def test_insertion_sort(interp_prelude):
    interp_prelude.eval_prelude(
        """
        (define (insert x sorted)
          (cond ((nil? sorted) (list x))
                ((<= x (car sorted)) (cons x sorted))
                (else (cons (car sorted) (insert x (cdr sorted))))))

        (define (sort ls)
          (foldl (lambda (acc x) (insert x acc)) '() ls))
        """
    )
    assert interp_prelude.eval("(sort '(3 1 2 5 4))") == to_lisp_list([1, 2, 3, 4, 5])
    assert interp_prelude.eval("(sort '())") == to_lisp_list([])


def test_symbolic_simplifier(interp_prelude):
    interp_prelude.eval_prelude(
        """
        (define (simplify e)
          (cond ((not (cons? e)) e)
                ((eq? (car e) '+)
                 (let ((a (simplify (car (cdr e))))
                       (b (simplify (car (cdr (cdr e))))))
                   (cond ((eq? a 0) b)
                         ((eq? b 0) a)
                         ((and (number? a) (number? b)) (+ a b))
                         (else `(+ ,a ,b)))))
                ((eq? (car e) '*)
                 (let ((a (simplify (car (cdr e))))
                       (b (simplify (car (cdr (cdr e))))))
                   (cond ((eq? a 1) b)
                         ((eq? b 1) a)
                         ((or (eq? a 0) (eq? b 0)) 0)
                         ((and (number? a) (number? b)) (* a b))
                         (else `(* ,a ,b)))))
                (else e)))
        """
    )
    assert interp_prelude.eval("(simplify '(+ (* 1 x) (* y 0)))") == Symbol("x")
    assert interp_prelude.eval("(simplify '(* (+ 2 3) z))") == to_lisp_list([Symbol("*"), 5, Symbol("z")])


def test_swap_macro_with_gensym(interp):
    interp.eval(
        """
        (define-macro (swap! a b)
          (let ((tmp (gensym)))
            `(let ((,tmp ,a))
               (set! ,a ,b)
               (set! ,b ,tmp))))
        (define p 1)
        (define q 2)
        (swap! p q)
        """
    )
    assert interp.eval("(list p q)") == to_lisp_list([2, 1])


def test_closure_counters(interp):
    interp.eval(
        """
        (define (make-counter)
          (let ((n 0))
            (lambda () (set! n (+ n 1)) n)))
        (define c1 (make-counter))
        (define c2 (make-counter))
        (c1)
        (c1)
        (c2)
        """
    )
    assert interp.eval("(list (c1) (c2))") == to_lisp_list([3, 2])
